from collections.abc import Mapping

from rest_framework import viewsets
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated

from .permissions import IsOwner


class OwnedResourceMixin:
    """
    Shared behaviour for records that belong to exactly one user.

    - list only returns the requesting user's records, in creation order.
    - single-record actions load from the whole table so that a missing
      record (404) is told apart from someone else's record (403).
    - create stamps the owner plus whatever `get_create_defaults` returns.
    """
    permission_classes = [IsAuthenticated, IsOwner]
    owner_field = 'user'
    not_found_message = 'Not found'
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.detail:
            return queryset
        return queryset.filter(**{self.owner_field: self.request.user})

    def get_object(self):
        queryset = self.get_queryset()
        lookup_url_kwarg = self.lookup_url_kwarg or self.lookup_field
        try:
            obj = queryset.get(**{self.lookup_field: self.kwargs[lookup_url_kwarg]})
        except queryset.model.DoesNotExist:
            raise NotFound(self.not_found_message)

        self.check_object_permissions(self.request, obj)
        return obj

    def get_create_defaults(self):
        return {}

    def get_serializer(self, *args, **kwargs):
        # Fields stamped by the server on create are dropped, not validated.
        data = kwargs.get('data')
        if self.action == 'create' and isinstance(data, Mapping):
            stamped = self.get_create_defaults()
            kwargs['data'] = {key: value for key, value in data.items() if key not in stamped}
        return super().get_serializer(*args, **kwargs)

    def perform_create(self, serializer):
        serializer.save(
            **{self.owner_field: self.request.user},
            **self.get_create_defaults()
        )


class OwnedResourceViewSet(OwnedResourceMixin, viewsets.ModelViewSet):
    """
    list / retrieve / create / update / destroy for an owned resource.
    PUT is always a partial update: omitted fields keep their values.
    """
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']

    def update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return super().update(request, *args, **kwargs)
