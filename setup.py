"""Packaging for pomotimer.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle (optional):
    pip install py2app
    python setup.py py2app
"""

from setuptools import setup, find_packages

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "pomotimer",
        "CFBundleDisplayName": "pomotimer",
        "CFBundleIdentifier": "com.pomotimer.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "LSMinimumSystemVersion": "13.0",
        "LSBackgroundOnly": False,
    },
}

setup(
    app=APP,
    data_files=DATA_FILES,
    options={"py2app": OPTIONS},
    name="pomotimer",
    version="0.1.0",
    description="Focus/break cycle timer engine with a Qt scheduler",
    packages=find_packages(include=["pomotimer", "pomotimer.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6>=6.5"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["pomotimer=pomotimer.__main__:main"]},
)
