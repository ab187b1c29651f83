from rng_service.server import main

main()
