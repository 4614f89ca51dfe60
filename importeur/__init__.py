"""
Importeur - Third-party launcher detection and Steam import

A Python-based tool to detect installed game launchers (Epic Games, Ubisoft
Connect, EA App, GOG Galaxy, Battle.net), list the games each one owns, and
import a selection of those games into Steam as non-Steam shortcuts.
"""

__version__ = "0.3.0"
__author__ = "jbruns"
