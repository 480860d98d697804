import os
from setuptools import setup, find_packages
import btcexplorer


def read_pip_requirements():
    reqs = []
    with open(os.path.join(os.path.dirname(__file__), "requirements.txt"), 'r') as f:
        lines = f.readlines()
    for line in lines:
        line = line.strip()
        if line and '://' not in line:
            reqs.append(line)
    return reqs


def read_file(name):
    with open(name, 'r', encoding='utf-8') as f:
        file = f.read()
    return file


setup(
    name='btcexplorer',
    version=btcexplorer.__version__,
    license='MIT',
    python_requires='>=3.8',
    description='Rate limited Bitcoin explorer clients',
    long_description=read_file('README.rst'),
    install_requires=read_pip_requirements(),
    extras_require={
        'test': ['pytest']
    },
    packages=find_packages(exclude=['tests', 'tests.*']),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    entry_points={
        'console_scripts': [
            'btcexplorer = btcexplorer.app:main'
        ]
    },
    include_package_data=True
)
