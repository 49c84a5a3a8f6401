#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Entry Point for the executable."""

import sys

import promise_demo

if __name__ == "__main__":
    sys.exit(promise_demo.main())
