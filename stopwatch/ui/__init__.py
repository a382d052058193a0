# stopwatch/ui/__init__.py
# Presentation layer: theming, live stopwatch screen & quick usage
# ! kept import-free; config imports ui.theming while ui.screen imports config
