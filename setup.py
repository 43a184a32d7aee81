"""Setup script for slot mention annotator package"""

from pathlib import Path
from setuptools import find_packages, setup

readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

setup(
    name="slot-mention-annotator",
    version="0.1.0",
    description="Find candidate slot-filler mentions and entity modifiers in tagged, parsed sentences",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="slot-mention-annotator",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "slot_mention_annotator.resources": ["gazetteer.yaml"],
    },
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0.0",
        "nltk>=3.8",
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "slot-mentions=slot_mention_annotator.cli:main",
        ]
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
