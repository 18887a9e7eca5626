from .mongo_customer_repository import MongoCustomerRepository
from .mongo_order_repository import MongoOrderRepository
from .mongo_part_repository import MongoPartRepository
from .mongo_role_repository import MongoRoleRepository
from .mongo_sales_order_repository import MongoSalesOrderRepository
