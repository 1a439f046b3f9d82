from setuptools import setup, find_packages


setup(
    name="crc32b",
    version="0.1",
    packages=find_packages(),
    description="Table-driven CRC-32 (reflected polynomial 0xEDB88320), zlib-compatible.",
    author="vercingetorx",
    python_requires=">=3.7",
    install_requires=[],
)
