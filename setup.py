#!/usr/bin/env python

from setuptools import setup

setup(name='jabberkit',
      version='0.1.0',
      description='Jabber/XMPP identifiers and element wrappers',
      author='jabberkit developers',
      packages=['jabberkit'],
      python_requires='>=3.9',
      install_requires=['lxml'],
      )
