from django.conf import settings
from django.utils.module_loading import import_string


def load_component(name):
    """
    Instantiates the class configured under settings.WELLNESS[name].
    """
    return import_string(settings.WELLNESS[name])()
