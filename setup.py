import os
from setuptools import setup, find_packages

SETUP_DIR = os.path.dirname(os.path.realpath(__file__))
README_PATH = os.path.join(SETUP_DIR, "README.md")

with open(README_PATH, "r") as readme:
    README = readme.read()

setup(
    name="mvn-coords",
    description="Maven-style coordinate parsing for build-tool integrations",
    long_description=README,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "cyclonedx-python-lib >= 7,< 9",
        "packageurl-python>=0.11",
        "pydantic>=2.0",
        "pydantic-settings>=2.7",
    ],
    extras_require={
        "dev": ["flake8", "pytest", "twine", "mypy>=0.812", "types-setuptools"]
    },
    entry_points={
        "console_scripts": [
            "mvn-coords = mvn_coords._cli:main"
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Software Development :: Build Tools"
    ]
)
