# -*- coding: utf-8 -*-
"""
Standalone launcher for the NpyViewer application.

This script exists as a convenience entry point so that end-users can start the
GUI simply by running:

    python NpyViewerApp.py [file.npy]

It performs no application logic itself. Instead, it imports the public
`main()` function from the `npyviewer` package and delegates the full startup
sequence to it.
"""

# NpyViewerApp.py
from npyviewer.main import main

if __name__ == "__main__":
    main()
