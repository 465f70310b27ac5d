from setuptools import setup, find_packages

setup(
    name="vinifera",
    version="0.1.0",
    description="Vinifera - Wine fermentation simulator with ABV, residual sugar and style estimates.",
    author="",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"vinifera": ["data/*.csv"]},
    python_requires=">=3.8",
    install_requires=[
        "pandas>=2.0.0",
        "pydantic>=2.0.0",
        "streamlit>=1.30.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
