# setup.py
from setuptools import setup, find_packages

setup(
    name="charm-inspect",
    version="0.4.0",
    description="Inspect the characters and the malformed bytes of a UTF-8 stream",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "wcwidth",    # Terminal column width of each character
        "fonttools",  # Unicode script property (fontTools.unicodedata)
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'charm=charm.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Topic :: Text Processing",
    ],
)
