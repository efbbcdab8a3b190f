"""setuptools setup for StudyGoal.

Install for development:
    pip install -e ".[test]"
"""

from setuptools import setup, find_packages

setup(
    name="StudyGoal",
    version="0.1.0",
    description="Study-time goal tracker and multi-subject sequence timer",
    packages=find_packages(include=["studygoal", "studygoal.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["studygoal = studygoal.__main__:main"],
    },
)
