from setuptools import setup, find_packages

setup(
    name="daemon-logging",
    version="0.2.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["requests", "PyJWT", "python-dotenv"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    description="Per-subsystem logger management with runtime level control for multi-threaded daemons",
    classifiers=["Programming Language :: Python :: 3"],
)
