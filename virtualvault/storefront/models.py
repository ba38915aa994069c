from django.core.validators import MinValueValidator
from django.db import models
from django.utils.text import slugify


def unique_slugify(model, base_slug, exclude_pk=None):
    """
    Создаёт уникальный slug на основе base_slug для заданной модели.

    Если slug уже существует, добавляет числовой суффикс (-2, -3, ...)
    до тех пор, пока не найдёт свободное значение.

    Example:
        >>> unique_slugify(Product, 'my-product')
        'my-product'
        >>> unique_slugify(Product, 'my-product')  # если уже существует
        'my-product-2'
    """
    slug = (base_slug or 'item').strip('-') or 'item'

    qs = model.objects.all()
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)

    uniq = slug
    i = 2
    while qs.filter(slug=uniq).exists():
        uniq = f"{slug}-{i}"
        i += 1
    return uniq


class Category(models.Model):
    name = models.CharField(max_length=100, unique=True, verbose_name='Name')
    slug = models.SlugField(max_length=120, unique=True, blank=True, verbose_name='URL slug')

    class Meta:
        verbose_name = 'Category'
        verbose_name_plural = 'Categories'
        ordering = ['name']

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slugify(Category, slugify(self.name), self.pk)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name


class Product(models.Model):
    name = models.CharField(max_length=255, verbose_name='Name')
    slug = models.SlugField(max_length=280, unique=True, blank=True, verbose_name='URL slug')
    description = models.TextField(blank=True, default='', verbose_name='Description')
    # float, а не Decimal: цена хранится и отдаётся без округления
    price = models.FloatField(validators=[MinValueValidator(0)], verbose_name='Price')
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name='products',
        verbose_name='Category'
    )
    quantity = models.PositiveIntegerField(default=0, verbose_name='Quantity')
    shipping = models.BooleanField(default=False, verbose_name='Shipping')
    photo = models.BinaryField(blank=True, null=True, editable=True, verbose_name='Photo')
    photo_content_type = models.CharField(max_length=100, blank=True, default='', verbose_name='Photo content type')
    created_at = models.DateTimeField(auto_now_add=True, verbose_name='Created')
    updated_at = models.DateTimeField(auto_now=True, verbose_name='Updated')

    class Meta:
        verbose_name = 'Product'
        verbose_name_plural = 'Products'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['category', '-created_at'], name='idx_product_category_created'),
            models.Index(fields=['price'], name='idx_product_price'),
        ]

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slugify(Product, slugify(self.name), self.pk)
        super().save(*args, **kwargs)

    @property
    def has_photo(self):
        return bool(self.photo)

    def __str__(self):
        return self.name
