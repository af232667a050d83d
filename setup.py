# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="webstager",
    version="1.0.0",
    description="Staging editor for multi-file web platform uploads",
    packages=find_namespace_packages(where="src", include=["webstager*"]),
    package_dir={"": "src"},
    package_data={"webstager.interface": ["locales/*.json"]},
    python_requires=">=3.9",
    install_requires=[
        "customtkinter",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'webstager=webstager.main:main',
            'webstager-cli=webstager.interface.cli.app:main',
        ],
        'gui_scripts': [
            'webstager-gui=webstager.interface.gui.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
