from setuptools import setup, find_packages

setup(
    name="form-datetime-range",
    version="1.0.0",
    description="Validation and parsing helpers for start/end date and time form fields",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "click>=8.2.1",
        "python-dotenv>=1.1.1",
        "pydantic>=2.11.7",
        "rich>=14.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "form-datetime=form_datetime_range.cli:main",
        ],
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
