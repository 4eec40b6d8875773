#!/usr/bin/env python

from setuptools import setup, find_packages

with open('requirements.txt') as f:
    requirements = f.read().splitlines()

setup(name='randkit',
      version='0.1',
      description='Securely seeded, thread-safe random numbers, strings and jitter',
      python_requires='>=3.7',
      install_requires=requirements,
      extras_require={
          'test': ['pytest'],
          },
      packages=find_packages(exclude=['randkit.tests']),
      package_data={
          'randkit': ['config_default.yaml'],
          },
      scripts = ['randkit_cli.py'],

	  classifiers=[
		  'Development Status :: 4 - Beta',
		  'Environment :: Console',
		  'Intended Audience :: Developers',
		  'License :: OSI Approved :: GNU Affero General Public License v3',
		  'Operating System :: POSIX :: Linux',
		  'Programming Language :: Python :: 3',
		  'Topic :: Software Development :: Libraries',
		  ],
     )
