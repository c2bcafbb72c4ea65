from setuptools import setup, find_packages

version = open('VERSION').read().strip()

setup(
    name="edgeopts",
    version=version,
    packages=find_packages(exclude=["tests", "examples"]),
    install_requires=["selenium>=4"],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.7",
    description="Options and capabilities for Microsoft Edge sessions "
    "driven by Selenium.",
    license="Apache 2.0",
    keywords=["selenium", "edge", "testing"],
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Testing",
        "Topic :: Software Development :: Quality Assurance"
    ],
)
