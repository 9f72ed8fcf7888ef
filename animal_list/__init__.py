# SPDX-License-Identifier: MIT
"""
List-and-detail demo application over an in-memory collection of animals.

`animal_list.core` hosts the domain model, the observable repository and
artwork lookup, while `animal_list.ui` contains Qt widgets and windows.
`animal_list.main` wires the desktop app together and
`animal_list.gradio_app` serves the same screens in a browser.
"""

__all__ = ["main"]
