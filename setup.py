import setuptools

setuptools.setup(
    name = 'splinefit',
    version = '1.0',
    description = 'smooth cubic Bezier curves through 2D points',
    packages = setuptools.find_packages(exclude=['tests']),
    install_requires=['numpy', 'scipy'],
    extras_require={'test': ['pytest']},
)
