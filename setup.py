from setuptools import setup, find_packages


setup(
    name='collection-access',
    author='collection-access contributors',
    description='Uniformly add to, get, check, remove from and replace named collections of mappings and objects.',
    keywords='collection accessor hydration',
    python_requires='>=3.8',
    setup_requires=['setupmeta>=3.0'],
    install_requires='@requirements.txt',
    extras_require={'test': '@requirements_test.txt'},
    packages=find_packages(exclude=['tests', 'tests.*']),
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
