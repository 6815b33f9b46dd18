from lexiscrape.main import main

main()
