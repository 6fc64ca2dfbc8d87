from catalog.services.facade import Catalog

catalog = Catalog()
