from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="hoop_goals",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"hoop_goals.metrics": ["metric_glossary.csv", "zones.yaml"]},
    version="0.3.0",
    license="GNU General Public License v3.0",
    description="Goal metrics for basketball game logs and practice sessions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords=["basketball", "shooting", "goals", "analytics"],
    install_requires=[
        "pandas>=2.2.0",
        "numpy>=1.26.4",
        "pyyaml>=6.0.1",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "black>=24.2.0",
            "codecov>=2.1.13",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ],
)
