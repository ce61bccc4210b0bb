from setuptools import find_packages, setup

setup(
    name="bmi_calculator",
    version="0.1.0",
    packages=find_packages(include=["app", "app.*"]),
    py_modules=["run"],
    install_requires=[
        "gradio>=4.44,<6",
        "pydantic>=2",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
