from setuptools import setup, find_packages

setup(
    name="mztabm",
    version="0.1.0",
    description="Format metabolomics results into the mzTab-M exchange format",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pandas",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
