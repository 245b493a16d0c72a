#!/usr/bin/env python

from setuptools import setup, find_packages

with open('requirements.txt') as f:
    requirements = f.read().splitlines()

setup(name='randbin',
      version='0.2',
      description='randbin - mutate random bytes of a file for fuzz testing',
      install_requires=requirements,
      extras_require={
          'test': ['pytest'],
          },
      packages=find_packages(),
      package_data={
          'randbin_fuzzer': ['config_default.yaml'],
          },
      scripts = ['randbin.py'],
      python_requires='>=3.6',

	  classifiers=[
		  'Development Status :: 4 - Beta',
		  'Environment :: Console',
		  'Intended Audience :: Developers',
		  'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
		  'Operating System :: POSIX',
		  'Programming Language :: Python :: 3',
		  'Topic :: Security',
		  'Topic :: Software Development :: Testing',
		  ],
     )
