"""
NpyViewer application package.

This package contains a Qt-based desktop viewer for 2-D NumPy arrays: load an
array, view it as a grayscale image, calibrate a linear axis system over it
and place, inspect, drag and delete annotation points.

Subpackages
-----------
- array_ops
    UI agnostic numerics: min/max normalisation into an 8-bit raster, raw
    value sampling, and the pixel -> logical axis transform.

- models
    ArrayDataset (decoded .npy buffer), AxisLimits/AxisCalibrator,
    AnnotationPoint/AnnotationStore and CurrentContext.

- interface
    The thin interaction layer: the pointer state machine, the ToolDispatcher
    that routes canvas events to it, and tool functions that operate on the
    context.

- ui
    Qt widgets: main ribbon, ViewerPage, AnnotationCanvas, axis limits panel
    and dialogs.

Other modules
-------------
- config
    Single in-memory configuration dictionary (con_dict) and helpers to
    mutate it.

- main
    Entry point defining MainRibbonController and the `main()` function to
    launch the GUI.

Typical usage
-------------
    python -m npyviewer.main [file.npy]

Scripted use needs no Qt:

    from npyviewer.models import CurrentContext
    from npyviewer.interface import tools as t
"""
