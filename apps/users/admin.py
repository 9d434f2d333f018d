from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import User


@admin.register(User)
class WellnessUserAdmin(UserAdmin):
    list_display = ('username', 'first_name', 'ai_companion_name', 'is_staff', 'date_joined')
    fieldsets = UserAdmin.fieldsets + (
        ('Companion', {'fields': ('ai_companion_name',)}),
    )
