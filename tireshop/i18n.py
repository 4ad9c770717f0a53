from enum import Enum


class Language(str, Enum):
    EN = "en"
    ES = "es"


# Translation dictionary
TRANSLATIONS = {
    "title": {"en": "Tire Inventory", "es": "Gestión de Neumáticos"},
    "dashboard": {"en": "Dashboard", "es": "Panel"},
    "inventory": {"en": "Inventory", "es": "Inventario"},
    "statistics": {"en": "Statistics", "es": "Estadísticas"},
    "logout": {"en": "Sign out", "es": "Salir"},
    "login": {"en": "Sign in", "es": "Ingresar"},
    "username": {"en": "Username", "es": "Usuario"},
    "password": {"en": "Password", "es": "Contraseña"},
    "login_failed": {"en": "Invalid username or password.",
                     "es": "Usuario o contraseña incorrectos."},
    "login_required": {"en": "Please sign in first.",
                       "es": "Por favor inicie sesión."},
    "signed_out": {"en": "Signed out.", "es": "Sesión cerrada."},
    "add_tire": {"en": "Add tire", "es": "Agregar Neumático"},
    "edit_tire": {"en": "Edit tire", "es": "Editar Neumático"},
    "delete_tire": {"en": "Delete tire", "es": "Eliminar Neumático"},
    "delete_confirm": {"en": "Delete this tire?",
                       "es": "¿Está seguro de eliminar este neumático?"},
    "search": {"en": "Search...", "es": "Buscar..."},
    "filter": {"en": "Filter", "es": "Filtrar"},
    "all_vehicles": {"en": "All vehicles", "es": "Todos los vehículos"},
    "all_seasons": {"en": "All seasons", "es": "Todas las temporadas"},
    "all_conditions": {"en": "All conditions",
                       "es": "Todas las condiciones"},
    "low_stock_only": {"en": "Low stock only", "es": "Solo stock bajo"},
    "no_tires": {"en": "No tires found", "es": "No se encontraron neumáticos"},
    "no_image": {"en": "No photo", "es": "Sin foto"},
    "brand": {"en": "Brand", "es": "Marca"},
    "model": {"en": "Model", "es": "Modelo"},
    "size": {"en": "Size", "es": "Tamaño"},
    "vehicle_type": {"en": "Vehicle", "es": "Vehículo"},
    "season": {"en": "Season", "es": "Temporada"},
    "condition": {"en": "Condition", "es": "Condición"},
    "stock": {"en": "Stock", "es": "Stock"},
    "min_stock": {"en": "Minimum stock", "es": "Stock mínimo"},
    "price": {"en": "Price", "es": "Precio"},
    "load_index": {"en": "Load index", "es": "Índice de carga"},
    "speed_rating": {"en": "Speed rating", "es": "Índice de velocidad"},
    "notes": {"en": "Notes", "es": "Notas"},
    "images": {"en": "Image URLs (one per line)",
               "es": "URLs de imágenes (una por línea)"},
    "actions": {"en": "Actions", "es": "Acciones"},
    "save": {"en": "Save", "es": "Guardar"},
    "cancel": {"en": "Cancel", "es": "Cancelar"},
    "total_stock": {"en": "Total stock", "es": "Stock Total"},
    "total_value": {"en": "Total value", "es": "Valor Total"},
    "average_price": {"en": "Average price", "es": "Precio Promedio"},
    "low_stock": {"en": "Low stock", "es": "Stock Bajo"},
    "categories": {"en": "Categories", "es": "Categorías"},
    "low_stock_alerts": {"en": "Low stock alerts",
                         "es": "Alertas de Stock Bajo"},
    "no_low_stock": {"en": "All stock levels are fine",
                     "es": "Todo el stock está en orden"},
    "by_brand": {"en": "Stock by brand", "es": "Distribución por Marca"},
    "by_vehicle_type": {"en": "Stock by vehicle",
                        "es": "Distribución por Vehículo"},
    "by_season": {"en": "Stock by season",
                  "es": "Distribución por Temporada"},
    "by_condition": {"en": "Stock by condition",
                     "es": "Distribución por Condición"},
    "top_value": {"en": "Top 5 by inventory value",
                  "es": "Top 5 - Mayor Valor en Inventario"},
    "unit_price": {"en": "Unit price", "es": "Precio Unit."},
    "export_csv": {"en": "Export CSV", "es": "Exportar CSV"},
    "export_excel": {"en": "Export Excel", "es": "Exportar Excel"},
    "import_excel": {"en": "Import Excel", "es": "Importar Excel"},
    "tire_created": {"en": "Tire created.", "es": "Neumático agregado."},
    "tire_updated": {"en": "Tire updated.", "es": "Neumático actualizado."},
    "tire_deleted": {"en": "Tire deleted.", "es": "Neumático eliminado."},
    "tire_not_found": {"en": "Tire not found.",
                       "es": "Neumático no encontrado."},
    "save_failed": {"en": "Error saving the tire.",
                    "es": "Error al guardar el neumático."},
    "delete_failed": {"en": "Error deleting the tire.",
                      "es": "Error al eliminar el neumático."},
    "import_done": {"en": "Imported {count} tires.",
                    "es": "{count} neumáticos importados."},
    "import_failed": {"en": "Import failed: {error}",
                      "es": "Error de importación: {error}"},
    "no_file": {"en": "Please choose a file.",
                "es": "Por favor seleccione un archivo."},
    # Enum labels
    "auto": {"en": "Car", "es": "Auto"},
    "light-truck": {"en": "Light truck", "es": "Camioneta"},
    "truck": {"en": "Truck", "es": "Camión"},
    "motorcycle": {"en": "Motorcycle", "es": "Moto"},
    "summer": {"en": "Summer", "es": "Verano"},
    "winter": {"en": "Winter", "es": "Invierno"},
    "all-season": {"en": "All season", "es": "All Season"},
    "new": {"en": "New", "es": "Nuevo"},
    "used": {"en": "Used", "es": "Usado"},
}

_current_lang = Language.EN


def set_language(lang):
    """Set the current language"""
    global _current_lang
    _current_lang = Language(lang)


def t(key: str, **kwargs) -> str:
    """Translate a key to the current language"""
    text = TRANSLATIONS.get(key, {}).get(_current_lang.value, key)
    return text.format(**kwargs) if kwargs else text


def label(value) -> str:
    """Localized display name of an enum member or raw enum value"""
    return t(getattr(value, "value", value))
