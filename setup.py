# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="rclonedirstat",
    version="0.1.0",
    description="Directory size statistics from rclone-style file listings",
    author="rclonedirstat contributors",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["rclonedirstat*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'rclonedirstat=rclonedirstat.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
