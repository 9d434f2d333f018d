from django.contrib import admin
from .models import ChatMessage


@admin.register(ChatMessage)
class ChatMessageAdmin(admin.ModelAdmin):
    list_display = ('user', 'is_ai', 'created_at')
    list_filter = ('is_ai',)
    search_fields = ('content', 'user__username')
