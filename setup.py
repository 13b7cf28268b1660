from setuptools import setup

setup(
    name='stackscript',
    version='0.1.0',
    description='StackScript: a tiny prefix-notation stack language interpreter',
    author='StackScript contributors',
    package_dir={'stackscript': 'src/stackscript'},
    packages=['stackscript', 'stackscript.cli'],
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=10.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'stks = stackscript.cli.main:main'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
