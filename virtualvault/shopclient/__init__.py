"""
Python-клиент витрины: воспроизводит поведение браузерного фронтенда
(корзина в local storage, формы входа/регистрации, строка поиска, главная
страница) поверх REST API /api/v1/.
"""
