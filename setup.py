import os

from setuptools import find_packages, setup


# read the version from the VERSION file
def get_version():
    with open(os.path.join(os.path.dirname(__file__), "VERSION"), "r") as version_file:
        return version_file.read().strip()


def get_long_description():
    with open(os.path.join(os.path.dirname(__file__), "README.md"), "r") as readme_file:
        return readme_file.read()


# Set the version in the kinesis_client/version.py file
def set_version_constant(version: str):
    with open(
        os.path.join(os.path.dirname(__file__), "kinesis_client", "version.py"), "w"
    ) as version_file:
        version_file.write(f'__version__ = "{version}"\n')


version = get_version()
set_version_constant(version)

setup(
    name="kinesis-client",
    version=version,
    description="Asynchronous client for Amazon Kinesis Data Streams",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    license="Apache License 2.0",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=[
        "boto3>=1.26.0",
        "botocore>=1.29.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Topic :: Software Development :: Libraries",
    ],
)
