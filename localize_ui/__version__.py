"""Version information for localize-ui."""

__version__ = "0.4.0"
__author__ = "localize-ui contributors"
__description__ = "Key-driven localization of text, fonts and images for UI components"

# Changelog:
# 0.4.0 - Generic widget adapter
#       - One LocalizeAdapter driven by a binding table replaces per-widget glue
#       - PropertyStore side-table for localization keys (weak, identity keyed)
#       - LocaleNotifier re-localizes subscribed widgets on language change
#
# 0.3.0 - Strings catalog
#       - StringsCatalog reads <lang>.lproj/*.strings tables
#       - Default language fallback for missing keys
#       - Image directory discovery (@2x/@3x suffixes collapsed)
#       - .localize.yml configuration with validation
#
# 0.2.0 - Fonts and segments
#       - Font style inference from font names (font.bold, font.light, ...)
#       - Decimal comma accepted in localized font sizes
#       - Segmented key syntax: "root: one, two"
#
# 0.1.0 - Initial release
#       - KeyResolver with value-as-key fallback and key capture
