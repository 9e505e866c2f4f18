"""Setup configuration for git_lead_time"""

from setuptools import setup, find_packages

setup(
    name="git-lead-time",
    version="0.1.0",
    description=(
        "CLI tool for GitHub team lead time: commit authorship to CI "
        "completion of merged pull requests."
    ),
    author="git-lead-time Contributors",
    author_email="",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "requests>=2.28.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=22.0",
            "flake8>=4.0",
            "mypy>=0.950",
        ],
    },
    entry_points={
        "console_scripts": [
            "git-lead-time=git_lead_time.main:main",
        ],
    },
)
