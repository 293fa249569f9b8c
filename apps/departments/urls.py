"""
URL configuration for departments app.
"""

from django.urls import path
from . import views

app_name = 'departments'

urlpatterns = [
    path('', views.department_list_view, name='department_list'),
    path('new/', views.department_create_view, name='department_create'),
    path('<int:pk>/', views.department_detail_view, name='department_detail'),
    path('<int:pk>/edit/', views.department_edit_view, name='department_edit'),
    path('<int:pk>/delete/', views.department_delete_view, name='department_delete'),
]
