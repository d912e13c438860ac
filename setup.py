from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="metaprops",
    version="1.0.0",
    author="Mason Parle",
    author_email="mason@masonparle.com",
    description="Lists all metadata properties of files, sorted and aligned",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/ParleSec/metaprops",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Multimedia",
        "Topic :: System :: Filesystems",
        "Development Status :: 5 - Production/Stable",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pillow>=9.0.0",
        "PyPDF2>=2.0.0",
        "mutagen>=1.45.0",
        "colorama>=0.4.6",
        "pywin32>=300; platform_system=='Windows'",
    ],
    entry_points={
        "console_scripts": [
            "metaprops=metaprops.main:run",
        ],
    },
)
