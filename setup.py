from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="tzperiod",
    version="0.0.1",
    author="",
    author_email="",
    description="DST-safe start/end of 10-minute, hour, day, week and month periods",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["tzperiod", "tzperiod.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "python-dateutil>=2.7.0",
        "isoweek>=1.3.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
