from django.apps import AppConfig


class ReportsConfig(AppConfig):
    """
    Sales, purchases and reporting summaries.
    Rows are written by other processes and browsed through the admin.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'reports'
    verbose_name = 'Reports'
