# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="docnav",
    version="0.1.0",
    description="Proxy pages for hidden Markdown documents and sidebar navigation for static doc sites",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["docnav*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'docnav=docnav.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
