from django.contrib import admin
from .models import Goal


@admin.register(Goal)
class GoalAdmin(admin.ModelAdmin):
    list_display = ('user', 'title', 'current', 'target', 'unit', 'deadline')
    search_fields = ('title', 'user__username')
