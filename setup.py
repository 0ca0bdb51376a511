#!/usr/bin/env python

from setuptools import setup

setup(name='chordid',
      version='1.0',
      description='A python library for identifying chord names from sounded notes and guitar fret positions',
      install_requires=['numpy', 'sounddevice'],
      extras_require={
        'test': [ 'pytest' ],
      },
      packages=['chordid', 'chordid.test'],
      package_dir = {'chordid': 'src'},
     )
