"""Worked solutions to some of the course exercises."""