import sys
from setuptools import setup, find_packages

# tomllib (used by tensoralg.config) is only in the standard library from 3.11
if sys.version_info < (3, 11):
    sys.exit("Sorry, Python >= 3.11 is required for tensoralg.")

# Read README for long description
try:
    with open("README.md", encoding="utf-8") as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = "tensoralg: arbitrary-rank tensor algebra over nested numeric arrays. (README not found)"


setup(
    name="tensoralg",
    version="0.1.0", # Should match the fallback __version__ in tensoralg/__init__.py
    description="Arbitrary-rank tensor algebra over nested numeric arrays",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    # Define the Python package structure
    packages=find_packages(include=["tensoralg", "tensoralg.*"]),
    # numpy is used for ndarray input, .numpy() export and .npy serialization
    install_requires=["numpy>=1.16"],
    extras_require={
        "test": ["pytest>=7"],
    },
    zip_safe=False,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.11",
)
