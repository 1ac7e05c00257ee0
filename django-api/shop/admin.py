from django.contrib import admin

from shop.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ["title", "variant", "sku", "price_cad", "category"]
    list_filter = ["category"]
    search_fields = ["title", "sku"]
