"""
Setup script for codonkit package.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_file = Path(__file__).parent / 'README.md'
if readme_file.exists():
    long_description = readme_file.read_text()
else:
    long_description = 'codonkit - codon translation and protein statistics'

setup(
    name='codonkit',
    version='1.0.0',
    description='Codon translation, mRNA inference and protein mass',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='codonkit Development Team',
    python_requires='>=3.8',
    packages=find_packages(include=['codonkit', 'codonkit.*']),
    install_requires=[
        'numpy>=1.20.0',
    ],
    extras_require={
        'dev': [
            'pytest>=6.0.0',
            'pytest-cov>=2.0.0',
            'black>=21.0',
            'mypy>=0.900',
            'flake8>=3.9.0',
        ]
    },
    entry_points={
        'console_scripts': [
            'codonkit=codonkit.cli.main:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Intended Audience :: Education',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
