import setuptools


install_requires = [
    "click",
    "pydantic>=2",
    "pydantic-settings",
]

dev_requires = install_requires + [
    "black",
    "pip-tools",
    "pre-commit",
    "pytest",
    "pytest-cov",
    "twine",
]

packages = setuptools.find_packages(include=["diskinformer", "diskinformer.*"])

setuptools.setup(
    name="diskinformer",
    version="0.1.0",
    description="Configuration for a cluster disk-metric informer (free space or repository size)",
    packages=packages,
    install_requires=install_requires,
    include_package_data=True,
    extras_require={"dev": dev_requires, "test": ["pytest", "pytest-cov"]},
    entry_points={'console_scripts': ['diskinformer = diskinformer.cli.__main__:diskinformer_cli']},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
)
