# Infrastructure Layer
# ====================
# Contains all external integrations:
# - persistence/: SQLAlchemy connector for the bookstore database
# - config/: Environment and settings management
#
# This layer can be replaced entirely without affecting domain/application layers.
