# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""VideoResolver - classify media-library entries into video items."""

from videoresolver.__about__ import __version__

__all__ = ["__version__"]
