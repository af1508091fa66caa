from setuptools import setup, find_packages

setup(
    name="chartfmt",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "Babel>=2.12",
        "pandas>=2.0",
        "matplotlib>=3.7",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["chartfmt=chartfmt.cli:main"],
    },
    python_requires=">=3.10",
    description="Formatter resolution for chart metrics: saved formats, overrides and embedded locale/currency",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ]
)
