""" elliptica build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import elliptica

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=elliptica.name,
    version=elliptica.__version__,
    license=elliptica.__license__,
    author=elliptica.__author__,
    author_email=elliptica.__author_email__,
    description="Elliptic curve arithmetic over prime fields, with ECDSA verification",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"elliptica": ["data/*.json"]},
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest", "coincurve"]},
    keywords=(
        "cryptography elliptic-curves weierstrass secp256k1 ecdsa "
        "montgomery-ladder public-key"
    ),
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
