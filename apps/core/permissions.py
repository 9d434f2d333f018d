import logging

from rest_framework.permissions import BasePermission

logger = logging.getLogger(__name__)


class IsOwner(BasePermission):
    """
    Allows access only to records whose owner is the requesting user.
    The view names the owning foreign key through `owner_field` (default 'user').
    """
    message = 'Access denied'

    def has_object_permission(self, request, view, obj):
        owner_field = getattr(view, 'owner_field', 'user')
        owner_id = getattr(obj, f'{owner_field}_id')
        if owner_id == request.user.id:
            return True

        logger.warning(
            f"[Access] Forbidden access attempt by User[{request.user.id}] "
            f"on {obj.__class__.__name__}[{obj.pk}]"
        )
        return False
