# -*- coding: utf-8 -*-
"""``python -m graphpaths`` runs the demonstration program."""

import sys

from graphpaths.demo import main

sys.exit(main())
