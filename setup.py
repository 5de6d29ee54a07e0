from pathlib import Path
from setuptools import setup, find_packages


def read_requirements(filename):
    with open(filename) as f:
        return [req for req in (req.partition('#')[0].strip() for req in f) if req]


setup(
    name='objadapter',
    version='0.1.0',
    description='Fill tables with data from python objects and collections.',
    long_description=Path('README.rst').read_text(),
    license='MIT',
    packages=find_packages(include=['objadapter', 'objadapter.*']),
    package_data={'objadapter': ['config.yml']},
    python_requires='>=3.8',
    install_requires=read_requirements('requirements.in'),
    extras_require={
        'test': read_requirements('requirements-test.in'),
    },
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Software Development :: Libraries',
    ],
)
