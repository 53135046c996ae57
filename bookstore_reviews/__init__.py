# Bookstore Review Updater
# ========================
# Interactive tool that rates a book review and writes it to the
# bookstore database's Reviews table.
#
# ARCHITECTURE LAYERS:
# - Presentation:   Terminal prompt loop (user interaction)
# - Application:    Review update use case (validate, build SQL, dispatch)
# - Domain:         Review model and validation rules (no external dependencies)
# - Infrastructure: Database connector and settings
