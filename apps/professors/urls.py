"""
URL configuration for professors app.
"""

from django.urls import path
from . import views

app_name = 'professors'

urlpatterns = [
    path('', views.professor_list_view, name='professor_list'),
    path('new/', views.professor_create_view, name='professor_create'),
    path('<int:pk>/', views.professor_detail_view, name='professor_detail'),
    path('<int:pk>/edit/', views.professor_edit_view, name='professor_edit'),
    path('<int:pk>/delete/', views.professor_delete_view, name='professor_delete'),
]
