from setuptools import setup, find_packages
setup(
    name='perceptual_volume',
    version='0.1.0',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    install_requires=['numpy', 'click', 'toml', 'matplotlib'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['perceptual-volume=perceptual_volume.cli:cli']}
)
