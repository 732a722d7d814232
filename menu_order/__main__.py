from menu_order.main import main

main()
