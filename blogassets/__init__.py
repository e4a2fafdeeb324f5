"""
Asset build pipeline and navigation behaviour for the blog theme.

Modules:
- core: task registry, composites and pipeline orchestration
- config: build configuration resolved from .env / environment
- files: gulp-style file selection
- images: in-place image recompression
- scripts: JavaScript minification
- styles: LESS compilation and CSS minification
- navigation: responsive image tagging and the sticky navbar controller
"""
