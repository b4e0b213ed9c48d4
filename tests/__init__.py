"""SLICEWISE test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- e2e/          : The installed CLI driven through Click's CliRunner.
- fixtures/     : Shared source fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O).
- e2e asserts user-observable output and exit status, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, property, e2e
"""
