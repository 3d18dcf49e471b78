#!/usr/bin/env python3
"""
manifest-locales - Main entry point

This is a simple launcher that runs the manifest_locales package as a module.
"""

if __name__ == "__main__":
    import runpy

    # Run the package as a module
    runpy.run_module("manifest_locales", run_name="__main__")
