from authdesk.wsgi import main

main()
