"""Dock settings, application items and the show-desktop applet."""