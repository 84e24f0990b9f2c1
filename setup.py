from setuptools import setup, find_packages

setup(name='juju-names',
      version="0.1.0",
      classifiers=[
          'Intended Audience :: Developers',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
          'Operating System :: OS Independent'],
      description="Juju entity name and tag parsing",
      long_description=open("README.rst").read(),
      license='BSD',
      packages=find_packages(exclude=["tests"]),
      python_requires=">=3.6",
      install_requires=["PyYAML"],
      extras_require={
          "test": ["pytest"]},
      entry_points={
          "console_scripts": [
              'juju-names = juju_names.cli:main']},
      )
