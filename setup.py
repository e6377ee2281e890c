from setuptools import setup, find_packages

setup(
    name="termdown",
    version="0.1.0",
    description="Render markdown as ANSI styled terminal text",
    packages=find_packages(include=["termdown", "termdown.*"]),
    install_requires=[
        "rich",
        "markdown-it-py",
        "pygments",
        "mdit-py-plugins",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["termdown=termdown.__main__:main"],
    },
    python_requires=">=3.11",
)
