# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="frisk",
    version="1.0.0",
    description="Directory size comparison and overview as a colorized tree",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["frisk", "frisk.*"]),
    python_requires=">=3.9",
    install_requires=[
        "rich>=13.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'frisk=frisk.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
