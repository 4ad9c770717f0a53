#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-02-03 06:54:54
"""
Entry point
"""
# ========================================================
# IMPORTS
# ========================================================
import logging
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from tireshop.app import create_app
from tireshop.config import HOST, PORT, APP_NAME, VERSION
from tireshop.logger import setup_logger


# ========================================================
# MAIN
# ========================================================
if __name__ == "__main__":
    setup_logger()
    app = create_app()

    logging.getLogger(__name__).info("%s v%s running on http://%s:%s",
                                     APP_NAME, VERSION, HOST, PORT)
    app.run(host=HOST, port=PORT, debug=False)
