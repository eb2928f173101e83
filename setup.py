from setuptools import setup, find_packages

setup(
    name='microdot',
    version='1.0.0',
    description='Interactive builder for labeled directed graphs with undo/redo and Graphviz export',
    packages=find_packages(include=['microdot', 'microdot.*', 'microdot_api', 'microdot_api.*']),
    install_requires=[
        'lxml>=6.0.0',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'microdot = microdot.__main__:main',
        ],
    },
    python_requires='>=3.8',
)
