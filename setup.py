from setuptools import setup, find_packages

setup(
    name="fnm_setup",
    version="0.1.0",
    packages=find_packages(include=["fnm_setup", "fnm_setup.*"]),
    description="Configure PowerShell and Command Prompt to initialise fnm (Fast Node Manager) on Windows.",
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "setup-fnm-windows=fnm_setup.cli:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: Microsoft :: Windows",
    ],
)
