from setuptools import find_packages, setup


setup(
    author="skewgen developers",
    python_requires='>=3.10',
    description="Thread-safe skewed random variables for workload generation",
    include_package_data=True,
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
    keywords='skewgen',
    name='skewgen',
    packages=find_packages(include=['skewgen', 'skewgen.*']),
    version='0.0.1',
)
