# -*- coding: utf-8 -*-

LOG_LEVEL = 'DEBUG'
LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'
