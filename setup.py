# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy-couch",
    version="0.0.3",
    description="Lispy Couch: a small S-Expression / Q-Expression interpreter",
    packages=find_packages(include=["lispy", "lispy.*", "lispy_lsp", "lispy_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "lispy=lispy.__main__:main",
            "lispy-ls=lispy_lsp.server:main",
        ],
    },
    zip_safe=False,
)
