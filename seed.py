from datetime import date, timedelta
from loguru import logger
from sqlmodel import Session, select
from app.db.core import engine, create_db_and_tables
from app.db.schema import ModuleRequest, WorkOrder, ProductionRecord
from app.models.logistics import ModuleRequestCreate
from app.models.work_order import WorkOrderCreate
from app.models.production import ProductionRecordCreate
from app.services.logistics import LogisticsService
from app.services.work_order import WorkOrderService
from app.services.production import ProductionService
from app.services.user import UserService


# 1. Demo account
DEMO_USER = {"email": "demo@factory.example.com", "password": "demo-password"}

# 2. Module requests: (module, requested_by, recipient, days ago, quantity)
DEMO_MODULE_REQUESTS = [
    ("CAM-001", "Alice", "Factory A", 12, 100),
    ("CAM-001", "Bob", "Factory B", 9, 40),
    ("BAT-210", "Alice", "Factory A", 9, 250),
    ("BAT-210", "Carol", "Factory C", 4, 80),
    ("SCR-550", "Bob", "Factory A", 2, 60),
]

# 3. Work orders: (module, created_by, assigned_to, priority, quantity, due in days)
DEMO_WORK_ORDERS = [
    ("Phone X1", "Alice", "Line 1", "High", 500, 7),
    ("Phone X1 Pro", "Carol", "Line 2", "Medium", 200, 14),
    ("Phone Lite", "Bob", "Line 3", "Low", 1000, 30),
]

# 4. Production: (work order ref, fulfilled_by, requested days ago, fulfilled days ago, qty)
DEMO_PRODUCTION = [
    ("WO-1001", "Line 1", 10, 11, 150),
    ("WO-1002", "Line 2", 8, 3, 90),
    ("WO-1003", "Line 3", 5, 5, 120),
]


def seed_user(session: Session):
    logger.info("--- Seeding Users ---")
    service = UserService(session)

    if service.get_user_by_email(DEMO_USER["email"]):
        logger.info(f"Existing User: {DEMO_USER['email']}")
        return

    service.register(DEMO_USER["email"], DEMO_USER["password"])
    logger.info(f"Created User: {DEMO_USER['email']}")


def seed_module_requests(session: Session):
    logger.info("--- Seeding Module Requests ---")
    if session.exec(select(ModuleRequest)).first():
        logger.info("Module requests already present, skipping")
        return

    service = LogisticsService(session)
    for module, requested_by, recipient, days_ago, quantity in DEMO_MODULE_REQUESTS:
        service.submit_module_request(ModuleRequestCreate(
            module=module,
            requested_by=requested_by,
            recipient=recipient,
            request_date=date.today() - timedelta(days=days_ago),
            quantity=quantity,
        ))
        logger.info(f"Created Module Request: {module} -> {recipient}")


def seed_work_orders(session: Session):
    logger.info("--- Seeding Work Orders ---")
    if session.exec(select(WorkOrder)).first():
        logger.info("Work orders already present, skipping")
        return

    service = WorkOrderService(session)
    for module, created_by, assigned_to, priority, quantity, due_in in DEMO_WORK_ORDERS:
        service.submit_work_order(WorkOrderCreate(
            module=module,
            created_by=created_by,
            assigned_to=assigned_to,
            created_date=date.today(),
            due_date=date.today() + timedelta(days=due_in),
            priority=priority,
            quantity=quantity,
        ))
        logger.info(f"Created Work Order: {module}")


def seed_production(session: Session):
    logger.info("--- Seeding Production Records ---")
    if session.exec(select(ProductionRecord)).first():
        logger.info("Production records already present, skipping")
        return

    service = ProductionService(session)
    for ref, fulfilled_by, requested_ago, fulfilled_ago, qty in DEMO_PRODUCTION:
        record = service.submit_production_record(ProductionRecordCreate(
            work_order_id=ref,
            fulfilled_by=fulfilled_by,
            date_requested=date.today() - timedelta(days=requested_ago),
            date_fulfilled=date.today() - timedelta(days=fulfilled_ago),
            produced_qty=qty,
        ))
        logger.info(
            f"Created Production Record: {ref} "
            f"(fulfilled={record.order_fulfilled}, on_time={record.order_on_time})")


def main():
    # Ensure tables exist (if not using Alembic)
    create_db_and_tables()

    # Each service commits its own writes
    with Session(engine) as session:
        try:
            seed_user(session)
            seed_module_requests(session)
            seed_work_orders(session)
            seed_production(session)

            logger.info("Database seeding completed successfully.")

        except Exception as e:
            session.rollback()
            logger.error(f"Seeding failed: {e}")
            raise e


if __name__ == "__main__":
    main()
