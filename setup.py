
from setuptools import setup

setup(
    name="choiceset",
    description="weighted random choices, dice rolls and weighted tables",
    version="0.1.0",
    license="MIT",
    packages=["choiceset"],
    package_dir={'': 'src'},
    install_requires=[
        "scipy >= 1.0",
        ],
    python_requires=">=3.6",
    entry_points={'console_scripts': ['choiceset = choiceset.__main__:main']},
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Topic :: Games/Entertainment :: Role-Playing",
        ],
    test_suite="tests")
