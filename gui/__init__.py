# -*- coding: utf-8 -*-
"""
qcatalog GUI Package

PySide6 bridge exposing the translation engine to Qt/QML views.
"""
