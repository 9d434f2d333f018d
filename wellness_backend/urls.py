from django.contrib import admin
from django.urls import include, path
from django.http import JsonResponse

urlpatterns = [
    path('', lambda request: JsonResponse({'status': 'WellnessSphere backend is running'})),
    path('admin/', admin.site.urls),
    path('api/', include('apps.users.urls')),
    path('api/', include('apps.diary.urls')),
    path('api/', include('apps.todos.urls')),
    path('api/', include('apps.goals.urls')),
    path('api/', include('apps.chat.urls')),
    path('api/', include('apps.mood.urls')),
    path('api/', include('apps.preferences.urls')),
    path('api/', include('apps.quotes.urls')),
]
