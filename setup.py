from setuptools import setup, find_packages

setup(
    name='newsdesk',
    version='0.1.0',
    description='Client SDK for the Newsdesk news-curation backend',
    packages=find_packages(include=['newsdesk', 'newsdesk.*']),
    python_requires='>=3.9',
    install_requires=[
        'requests>=2.28',
        'pydantic>=2.0',
        'PyJWT>=2.0',
        'termcolor>=2.0',
    ],
    extras_require={
        'dev': [
            'pytest',
            'pytest-mock',
            'requests_mock',
        ],
    },
    entry_points={
        'console_scripts': [
            'newsdesk=newsdesk.cli:main',
        ],
    },
)
