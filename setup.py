from setuptools import setup
from setuptools import find_packages

PACKAGE_NAME = "geomutils"
VERSION_MINOR = 1
VERSION_MAJOR = 0

setup(
    name=PACKAGE_NAME,
    version=f"{VERSION_MAJOR}.{VERSION_MINOR}",
    packages=find_packages(
        where="src",
    ),
    package_dir={"": "src"},
    install_requires=[
        "click",
        "numpy",
        "pydantic>=2",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": "geomutils=geomutils.__main__:main"
    },
    author="Stepan Dyatkovskiy",
    author_email="ml@dyatkovskiy.com",
    description="Conversion, measurement, scaling and alignment helpers for 2D GUI geometry.",
    license="GPL3",
    keywords="python geometry rect alignment",
)
