""" ecdsalib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecdsalib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecdsalib.name,
    version=ecdsalib.__version__,
    license=ecdsalib.__license__,
    author=ecdsalib.__author__,
    author_email=ecdsalib.__author_email__,
    description="secp256k1 elliptic curve arithmetic and ECDSA",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ecdsalib": ["data/*.json"]},
    include_package_data=True,
    # install_requires=[],
    extras_require={"test": ["pytest", "coincurve"]},
    keywords="cryptography elliptic-curves secp256k1 ecdsa SEC-1",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
