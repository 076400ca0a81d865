from hotel_reservations.interfaces.cli import main

main()
