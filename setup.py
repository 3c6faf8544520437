from setuptools import setup, find_packages

setup(
    name="interview-answer-eval",
    version="0.1.0",
    description="Rule-based scoring and feedback for free-text interview answers",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"interview_eval.config": ["*.yaml"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "structlog>=23.0",
        "python-dotenv>=1.0",
        "textblob>=0.17",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "interview-eval=interview_eval.cli:main",
        ],
    },
)
