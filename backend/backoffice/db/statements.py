"""SQL Statements — every query the resource controllers issue, in one place.

Invariants:
    - Named parameters (":name") match Parameter Store keys without the "$" marker
    - Inserts end with RETURNING id so run() can echo the generated identifier
    - Child lookups are scoped to the parent identifier already bound to the request
    - Lists are ordered by id so repeated reads are identical
"""

# ─── Employee ────────────────────────────────────────────────────

GET_EMPLOYEE = """
    SELECT * FROM employees
    WHERE id = :employeeId
"""

LIST_EMPLOYEES = """
    SELECT * FROM employees
    WHERE is_current_employee = 1
    ORDER BY id
"""

CREATE_EMPLOYEE = """
    INSERT INTO employees (name, position, wage, is_current_employee)
    VALUES (:name, :position, :wage, :isCurrentEmployee)
    RETURNING id
"""

UPDATE_EMPLOYEE = """
    UPDATE employees
    SET name = :name,
        position = :position,
        wage = :wage,
        is_current_employee = :isCurrentEmployee
    WHERE id = :employeeId
"""

RETIRE_EMPLOYEE = """
    UPDATE employees
    SET is_current_employee = 0
    WHERE id = :employeeId
"""

# ─── Timesheet ───────────────────────────────────────────────────

GET_TIMESHEET = """
    SELECT * FROM timesheets
    WHERE id = :timesheetId AND employee_id = :employeeId
"""

LIST_TIMESHEETS = """
    SELECT * FROM timesheets
    WHERE employee_id = :employeeId
    ORDER BY id
"""

CREATE_TIMESHEET = """
    INSERT INTO timesheets (hours, rate, date, employee_id)
    VALUES (:hours, :rate, :date, :employeeId)
    RETURNING id
"""

UPDATE_TIMESHEET = """
    UPDATE timesheets
    SET hours = :hours,
        rate = :rate,
        date = :date
    WHERE id = :timesheetId AND employee_id = :employeeId
"""

DELETE_TIMESHEET = """
    DELETE FROM timesheets
    WHERE id = :timesheetId AND employee_id = :employeeId
"""

# ─── Menu ────────────────────────────────────────────────────────

GET_MENU = """
    SELECT * FROM menus
    WHERE id = :menuId
"""

LIST_MENUS = """
    SELECT * FROM menus
    ORDER BY id
"""

CREATE_MENU = """
    INSERT INTO menus (title)
    VALUES (:title)
    RETURNING id
"""

UPDATE_MENU = """
    UPDATE menus
    SET title = :title
    WHERE id = :menuId
"""

DELETE_MENU = """
    DELETE FROM menus
    WHERE id = :menuId
"""

FIND_MENU_DEPENDENT = """
    SELECT id FROM menu_items
    WHERE menu_id = :menuId
    LIMIT 1
"""

# ─── MenuItem ────────────────────────────────────────────────────

GET_MENU_ITEM = """
    SELECT * FROM menu_items
    WHERE id = :menuItemId AND menu_id = :menuId
"""

LIST_MENU_ITEMS = """
    SELECT * FROM menu_items
    WHERE menu_id = :menuId
    ORDER BY id
"""

CREATE_MENU_ITEM = """
    INSERT INTO menu_items (name, description, inventory, price, menu_id)
    VALUES (:name, :description, :inventory, :price, :menuId)
    RETURNING id
"""

UPDATE_MENU_ITEM = """
    UPDATE menu_items
    SET name = :name,
        description = :description,
        inventory = :inventory,
        price = :price
    WHERE id = :menuItemId AND menu_id = :menuId
"""

DELETE_MENU_ITEM = """
    DELETE FROM menu_items
    WHERE id = :menuItemId AND menu_id = :menuId
"""
