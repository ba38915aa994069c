"""
Django REST Framework Serializers for Storefront API.

Формат ответа совместим с клиентом витрины: идентификатор отдаётся как `_id`,
даты в camelCase. Фото товара никогда не сериализуется, для него есть
отдельный endpoint product-photo.
"""

from rest_framework import serializers

from .models import Product, Category


class CategorySerializer(serializers.ModelSerializer):
    """
    Сериализатор для категорий товаров.

    Fields:
        - _id: ID категории
        - name: Название
        - slug: URL slug
    """
    _id = serializers.IntegerField(source='id', read_only=True)

    class Meta:
        model = Category
        fields = ['_id', 'name', 'slug']
        read_only_fields = ['slug']


class ProductSerializer(serializers.ModelSerializer):
    """
    Сериализатор товара (снимок, который кладётся в корзину).

    Fields:
        - _id: ID товара
        - name, slug, description
        - price: Цена (float, без округления)
        - category: ID категории
        - quantity: Остаток
        - shipping: Доставка
        - createdAt / updatedAt
    """
    _id = serializers.IntegerField(source='id', read_only=True)
    category = serializers.PrimaryKeyRelatedField(read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Product
        fields = [
            '_id', 'name', 'slug', 'description', 'price',
            'category', 'quantity', 'shipping', 'createdAt', 'updatedAt'
        ]
        read_only_fields = ['slug']


class ProductFilterSerializer(serializers.Serializer):
    """
    Параметры фильтра главной страницы.

    Fields:
        - checked: список ID категорий (пустой = все категории)
        - radio: диапазон цены [min, max] включительно (пустой = любая цена)
    """
    checked = serializers.ListField(
        child=serializers.IntegerField(),
        required=False,
        default=list
    )
    radio = serializers.ListField(
        child=serializers.FloatField(),
        required=False,
        default=list
    )

    def validate_radio(self, value):
        if value and len(value) != 2:
            raise serializers.ValidationError('radio must be [min, max]')
        if value and value[0] > value[1]:
            raise serializers.ValidationError('radio min must not exceed max')
        return value
