"""Setup module."""

import re
from setuptools import setup


def read_file(filename):
    """Read file correctly."""
    with open(filename) as _file:
        return _file.read().strip()


def requirements(filename):
    """Parse requirements from file."""
    return [
        line.split("#", 1)[0].strip()
        for line in read_file(filename).splitlines()
        if line.split("#", 1)[0].strip()
    ]


def version():
    data = read_file("./proxyconf/version.py")
    return re.findall(r"__version__ = \"([a-z0-9.]*)\"", data)[0]


pypy_marker = "platform_python_implementation != 'PyPy'"


def add_marks(dependencies, marks):
    """Add markers to dependencies.

    Example:
        mypy>=1.0.0 -> mypy>=1.0.0 ; platform_python_implementation...
    """

    def _map_func(dependency):
        for item, marker in marks.items():
            if dependency.startswith(item):
                return dependency + marker
        return dependency

    return list(map(_map_func, dependencies))


setup(
    name="proxyconf",
    version=version(),
    description="Proxy configuration blob and endpoint codec",
    author="Johanderson Mogollon",
    author_email="johanderson@mogollon.com.ve",
    long_description=read_file("README.md"),
    long_description_content_type="text/markdown",
    license="MIT",
    packages=[
        "proxyconf",
    ],
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Internet :: Proxy Servers",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
    ],
    install_requires=requirements("./requirements.txt"),
    extras_require={
        "test": add_marks(
            requirements("./test-requirements.txt"),
            {
                "mypy": " ;" + pypy_marker,
                "pytest-mypy": " ;" + pypy_marker,
            },
        )
    },
)
